"""Analytics/derivation engine for the Idea Validator.

Turns an owner's idea history into chart-ready aggregates:
  score series / distribution → development & deployment taxonomies
  → roadmap expansion → pitch analytics → market, financial and
  competitive projections → DashboardResponse
"""
