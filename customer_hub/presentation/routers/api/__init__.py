"""Customer API: middleware, error mapping, endpoints and route registry.

The router itself lives in ``router.py`` so that importing the trace
middleware never pulls in the endpoint modules.
"""
