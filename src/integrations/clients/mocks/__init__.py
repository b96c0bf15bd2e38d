"""
Mock integration clients.

These clients serve review data from local JSON fixtures without calling any
external API. They are used when USE_MOCK=true:
- before the upstream review API is reachable
- to run the frontend end-to-end against stable data

Important:
- Mock clients must follow the SAME interface as real HTTP clients
  (ReviewSourceClient in src/integrations/contracts/reviews.py).
"""
