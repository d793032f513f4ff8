"""
scoring/ — Twin Matrix scoring core

Modules:
    utils.py                - Decimal rounding helpers
    classifier.py           - Attribute code → category key (first match wins)
    transformer.py          - Score → bucket / intensity / percentage / hex / trend
    filter_sort.py          - Category filter, stable ranking, snapshot summary
    smoothing_explainer.py  - Reconstructed exponential-smoothing trace
    validation.py           - Out-of-range policy for upstream snapshots
"""
