"""
Task subsystem.

Components:
- task_models.py: data structures (Task, AddTaskResult)
- task_errors.py: error kinds raised by registry/scheduler/codec
- task_graph.py: TaskRegistry (tasks + dependency indices)
- cycle_detector.py: three-colour DFS over the dependency graph
- task_scheduler.py: priority-ordered topological scheduling
- task_codec.py: JSON wire schema (dump/parse)
- task_store.py: file-backed payload store
- execution_log.py: "Executed Task" log file writer
- task_api.py: small high-level helpers used by the rest of the app
"""
