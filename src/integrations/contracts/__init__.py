"""
Contracts (data models).

Defines the shapes shared by the mock and real HTTP review clients:
- resource categories served by the proxy
- the paginated envelope returned in mock mode
- the typed query parameters of the filtered endpoints

Both mock and real HTTP clients implement ReviewSourceClient from reviews.py.
"""
