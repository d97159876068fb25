"""
API package.

``router.py`` aggregates the per‑resource routers found in
``endpoints`` and ``responses.py`` builds the JSON envelopes shared by
every handler.
"""
