#!/usr/bin/env python3
"""
Rule Loader - Load YAML rules from recon_rules directory
Column headers (10_columns.yaml) and classification keywords (20_categories.yaml)
"""

import yaml
import logging
import hashlib
from pathlib import Path
from typing import Dict, Any, Optional, List

logger = logging.getLogger(__name__)

COLUMNS_RULE_FILE = '10_columns.yaml'
CATEGORIES_RULE_FILE = '20_categories.yaml'


class RuleLoader:
    """Load and cache YAML rule files"""

    def __init__(self, rules_dir: Path, enable_hot_reload: bool = False):
        """
        Initialize rule loader with rules directory

        Args:
            rules_dir: Path to recon_rules directory
            enable_hot_reload: Enable checksum-based hot-reload (default: False)
                              Set to True only while editing rule files
        """
        self.rules_dir = Path(rules_dir)
        self._rules_cache: Dict[str, Dict[str, Any]] = {}
        self._file_checksums = {} if enable_hot_reload else None  # Only track when enabled
        self._enable_hot_reload = enable_hot_reload
        self._file_read_count = 0

    def _calculate_file_checksum(self, file_path: Path) -> str:
        """Calculate MD5 checksum for a file"""
        with open(file_path, 'rb') as f:
            return hashlib.md5(f.read()).hexdigest()

    def _should_reload_file(self, filename: str, rule_file: Path) -> bool:
        """Check if a rule file should be reloaded based on checksum"""
        # Fast path: when hot-reload is disabled, only check cache
        if not self._enable_hot_reload:
            return filename not in self._rules_cache

        current_checksum = self._calculate_file_checksum(rule_file)
        cached_checksum = self._file_checksums.get(filename)

        if current_checksum != cached_checksum:
            if cached_checksum:
                logger.debug(f"Rule file {filename} modified, reloading...")
            return True

        return False

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load a YAML file directly"""
        self._file_read_count += 1
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error(f"Error loading YAML file {file_path}: {e}")
            raise
        if not isinstance(data, dict):
            raise ValueError(f"Rule file {file_path} must contain a mapping at top level")
        return data

    def load_rule_file_by_name(self, filename: str) -> Dict[str, Any]:
        """
        Load a specific rule file by filename (e.g., '20_categories.yaml')

        Args:
            filename: Rule file name

        Returns:
            Rule dictionary or empty dict if not found
        """
        rule_file = self.rules_dir / filename

        if not rule_file.exists():
            logger.warning(f"Rule file not found: {rule_file}")
            return {}

        if self._should_reload_file(filename, rule_file):
            self._rules_cache[filename] = self._load_yaml_file(rule_file)
            if self._enable_hot_reload:
                self._file_checksums[filename] = self._calculate_file_checksum(rule_file)
            logger.debug(f"Loaded rule file: {filename}")
        return self._rules_cache[filename]

    def get_column_rules(self) -> Dict[str, Any]:
        """Get required column definitions from 10_columns.yaml"""
        rules = self.load_rule_file_by_name(COLUMNS_RULE_FILE)
        return rules.get('columns', {})

    def get_category_rules(self) -> Dict[str, Any]:
        """Get beer/bottle keywords from 20_categories.yaml"""
        rules = self.load_rule_file_by_name(CATEGORIES_RULE_FILE)
        return rules.get('categories', {})

    def get_keyword_list(self, section: str, key: str) -> Optional[List[str]]:
        """
        Get a list of keywords from the categories rule file

        Args:
            section: Section name ('beer' or 'bottles')
            key: Keyword list name inside the section (e.g. 'category_prefixes')

        Returns:
            List of non-empty strings, or None when the rule file does not set it
        """
        values = self.get_category_rules().get(section, {}).get(key)
        if values is None:
            return None
        if isinstance(values, str):
            values = [values]
        return [str(v) for v in values if v is not None and str(v) != '']

    def clear_cache(self):
        """Clear the rules cache"""
        logger.debug("Clearing rules cache")
        self._rules_cache.clear()
        if self._file_checksums is not None:
            self._file_checksums.clear()

    def get_file_read_count(self) -> int:
        return self._file_read_count

    def reset_file_read_count(self):
        self._file_read_count = 0
