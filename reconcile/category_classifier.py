"""
Category Classifier
Decides whether a receipt row counts as draft beer, as a PET bottle, or neither,
using keyword rules from 20_categories.yaml (built-in defaults otherwise).
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)

DEFAULT_BEER_CATEGORY_PREFIXES = ('Pivovar', 'Pivo na čepu', 'Brewery', 'Draft beer')
DEFAULT_BOTTLE_CATEGORY_NAMES = ('PET láhve', 'PET bottles')
DEFAULT_BOTTLE_PRODUCT_PREFIXES = ('Láhev', 'Bottle')


def chars_equal_fold(a: str, b: str) -> bool:
    """Case-insensitive comparison of two single characters (accents kept)"""
    if a == b:
        return True
    return a.lower() == b.lower() or a.upper() == b.upper()


def has_prefix_fold(text: str, prefix: str) -> bool:
    """
    True if text starts with prefix, ignoring case character by character.

    "PIVOVAR X" starts with "Pivovar"; "Lahev" does not start with "Láhev".
    """
    if not prefix:
        return True
    if len(text) < len(prefix):
        return False
    return all(chars_equal_fold(a, b) for a, b in zip(text, prefix))


def equal_fold(a: str, b: str) -> bool:
    """Whole-string version of has_prefix_fold"""
    return len(a) == len(b) and has_prefix_fold(a, b)


@dataclass(frozen=True)
class RowClass:
    is_beer: bool
    is_bottle: bool


class CategoryClassifier:
    """
    Rule-based classifier for receipt rows.
    Both checks run on every row; a row may be beer, bottle, both or neither.
    """

    def __init__(self, rule_loader=None,
                 beer_category_prefixes: Optional[Sequence[str]] = None,
                 bottle_category_names: Optional[Sequence[str]] = None,
                 bottle_product_prefixes: Optional[Sequence[str]] = None):
        """
        Initialize classifier

        Args:
            rule_loader: Optional RuleLoader; keyword lists found in
                         20_categories.yaml replace the defaults
            beer_category_prefixes: Explicit override (wins over rule files)
            bottle_category_names: Explicit override (wins over rule files)
            bottle_product_prefixes: Explicit override (wins over rule files)
        """
        rules_beer = rules_names = rules_products = None
        if rule_loader is not None:
            rules_beer = rule_loader.get_keyword_list('beer', 'category_prefixes')
            rules_names = rule_loader.get_keyword_list('bottles', 'category_names')
            rules_products = rule_loader.get_keyword_list('bottles', 'product_prefixes')

        self.beer_category_prefixes = self._pick(beer_category_prefixes, rules_beer,
                                                 DEFAULT_BEER_CATEGORY_PREFIXES)
        self.bottle_category_names = self._pick(bottle_category_names, rules_names,
                                                DEFAULT_BOTTLE_CATEGORY_NAMES)
        self.bottle_product_prefixes = self._pick(bottle_product_prefixes, rules_products,
                                                  DEFAULT_BOTTLE_PRODUCT_PREFIXES)

        logger.debug(
            f"CategoryClassifier initialized with {len(self.beer_category_prefixes)} beer prefixes, "
            f"{len(self.bottle_category_names)} bottle categories, "
            f"{len(self.bottle_product_prefixes)} bottle product prefixes"
        )

    @staticmethod
    def _pick(explicit, from_rules, default) -> List[str]:
        for candidate in (explicit, from_rules):
            if candidate is not None:
                return list(candidate)
        return list(default)

    def is_beer_category(self, category: str) -> bool:
        return any(has_prefix_fold(category, p) for p in self.beer_category_prefixes)

    def is_bottle_category(self, category: str) -> bool:
        return any(equal_fold(category, name) for name in self.bottle_category_names)

    def is_bottle_product(self, product: str) -> bool:
        return any(has_prefix_fold(product, p) for p in self.bottle_product_prefixes)

    def is_bottle_row(self, category: str, product: str) -> bool:
        return self.is_bottle_category(category) and self.is_bottle_product(product)

    def classify(self, category: str, product: str) -> RowClass:
        return RowClass(
            is_beer=self.is_beer_category(category),
            is_bottle=self.is_bottle_row(category, product),
        )
