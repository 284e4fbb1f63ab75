"""
Application core: AppState (composition of registry/store/log) and the
Protocols the task API depends on.
"""
