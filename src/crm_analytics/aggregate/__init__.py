"""Dashboard aggregation helpers.

This package turns the input collections into the derived dashboard views
(KPI headlines and trends, pipeline buckets, leaderboards). Datasets are small,
so every view is recomputed eagerly with pandas on each call.
"""
