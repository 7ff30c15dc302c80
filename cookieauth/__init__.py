"""Cookie-based JWT session demo: Flask backend and Streamlit client."""

__version__ = "0.1.0"
