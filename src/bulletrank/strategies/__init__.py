from bulletrank.strategies.base import BaseStrategy, register_strategy, get_strategy, list_strategies  # noqa: F401

# Import built-in strategies to trigger registration
import bulletrank.strategies.full_sort  # noqa: F401
import bulletrank.strategies.bounded_heap  # noqa: F401
