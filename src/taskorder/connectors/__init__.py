"""
Connectors: ways of talking to the user. Only the interactive console for now.
"""
