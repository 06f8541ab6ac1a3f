"""
REST API module for acpd.

Provides FastAPI endpoints for:
- The budget-constrained primer
- Symbol, file, graph, domain and constraint queries
- Stats, directory map and variable expansion
"""
