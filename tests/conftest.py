import pytest

from oneliners.domain.generators import default_generator
from oneliners.rules.loader import default_rules


@pytest.fixture(autouse=True)
def reset_cached_rules():
    """
    Clear cached rules and the default generator around each test so an
    $ONELINERS_RULES override set by one test does not leak into the next.
    """
    default_rules.cache_clear()
    default_generator.cache_clear()
    yield
    default_rules.cache_clear()
    default_generator.cache_clear()
