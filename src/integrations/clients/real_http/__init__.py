"""
Real HTTP integration clients.

These clients call the upstream review API over HTTP.

Important:
- Must implement the same interface as the mock clients
- Must return the upstream JSON body unmodified

Switching:
Mock vs real selection happens in build_review_client only.
"""
