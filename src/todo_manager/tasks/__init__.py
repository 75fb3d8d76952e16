"""
Task subsystem.

Components:
- task_models.py: Task record, todo.txt line parser/serializer, content hash
- task_sort.py: due-date ordering with the day-marker tie-break
- task_dates.py: due:today / due:tomorrow / due:<weekday> rewriting
- task_store.py: todo.txt file load/save/backup/archive
- task_api.py: numbering helpers and the operations behind each subcommand
"""
