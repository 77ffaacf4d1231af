"""
Streamlit view for FootyCast.

- `client` talks to the proxy.
- `state` tracks loading / error / loaded.
- `formatting` derives the strings shown on each card.
"""
