"""
Fieldcrew collaborator permissions, schedules and profiles
"""
