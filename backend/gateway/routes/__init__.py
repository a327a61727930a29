"""Gateway Route Modules — mirror the main server's paths, validate, then forward.

Invariants:
    - Each route validates with the same schemas and query dependencies as the
      main server, so invalid input is answered with 400 here
    - Routes never interpret upstream answers (status and body pass through)
"""
