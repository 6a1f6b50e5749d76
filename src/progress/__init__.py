"""
Progress: XP, levels, streaks, per-item mastery and achievements.

- engine: pure transitions over UserProgress snapshots
- achievements: unlock conditions and XP rewards
- store: JSON-file and SQL snapshot persistence
"""
