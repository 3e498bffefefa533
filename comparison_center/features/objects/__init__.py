"""
Object feature module.

Objects are the catalog entries being compared. Each belongs to one
comparison and carries a value per custom option through association rows.
"""
