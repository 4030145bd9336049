#!/usr/bin/env python3
"""
Configuration file for Beer/Bottle Receipt Reconciliation
Edit these values according to your POS export setup
"""

import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent

# Rule files (header names, category keywords)
# - 10_columns.yaml: required column headers and accepted aliases
# - 20_categories.yaml: beer / PET bottle classification keywords
# Set RECON_RULES_DIR to point at a different rule set.
# Set RECON_HOT_RELOAD=1 to re-read rule files when they change on disk.
RULES_DIR = os.getenv('RECON_RULES_DIR', str(PROJECT_ROOT / 'recon_rules'))
RULES_HOT_RELOAD = os.getenv('RECON_HOT_RELOAD', '0') == '1'

# Receipt Processing Settings
RECEIPT_PROCESSING = {
    'supported_formats': ['.xlsx', '.csv'],  # Checked before any read attempt
    'csv_encoding': 'utf-8-sig',             # BOM is dropped while decoding
}

# Report Settings
# message_limit matches the downstream chat message size (4096) minus headroom
REPORT_SETTINGS = {
    'message_limit': int(os.getenv('RECON_MESSAGE_LIMIT', '3900')),
    'truncation_marker': '...truncated',
    'empty_report_text': 'No matching beer/PET rows found.',
}

# File Paths
PATHS = {
    'log_folder': os.getenv('RECON_LOG_DIR', ''),  # Empty: log to stderr only
}

# Logging Settings
LOGGING = {
    'level': os.getenv('RECON_LOG_LEVEL', 'INFO'),  # DEBUG, INFO, WARNING, ERROR
    'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}
