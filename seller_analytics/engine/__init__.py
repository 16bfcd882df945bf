from seller_analytics.engine.aggregation import accumulate_records, build_ledgers, index_by
from seller_analytics.engine.projection import project_results, project_summary
from seller_analytics.engine.ranking import assign_bonuses, rank_by_profit
from seller_analytics.engine.top_products import resolve_limit, select_top_products
from seller_analytics.engine.validation import validate_inputs

__all__ = [
    "accumulate_records",
    "assign_bonuses",
    "build_ledgers",
    "index_by",
    "project_results",
    "project_summary",
    "rank_by_profit",
    "resolve_limit",
    "select_top_products",
    "validate_inputs",
]
