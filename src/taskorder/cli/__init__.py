"""
Command-line surface: entrypoint (main), composition root (bootstrap) and the
slash-command registry (commands).
"""
