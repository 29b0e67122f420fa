"""Schema inference and cross-document relationship analysis for JSON libraries."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
