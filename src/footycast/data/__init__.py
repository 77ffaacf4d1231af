"""
Data layer for FootyCast.

Includes:
- Prediction schema and validation (`schema`)
- The Predicd API client (`upstream`)
- Tabular helpers (`data_loader`)
"""
