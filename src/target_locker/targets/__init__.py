"""
Target subsystem.

Components:
- target_models.py: data structures (Target, TargetStats)
- target_store.py: JSON file storage (whole-list load/save)
- target_api.py: lifecycle operations (add / toggle / delete / stats)
- reminder_scheduler.py: polling loop that reminds about targets due today
"""
