"""
Automation toolkit for an art print shop.

Modules:
- core: product image pipeline orchestration
- assets: artwork lookup in the input folder
- layout / shadows / easing: placement geometry and layered drop shadows
- render: backgrounds and compositing
- encoder: size-constrained re-encoding
- snapshots: JSON dumps of API responses
- shopify: REST and GraphQL product adapters
"""
