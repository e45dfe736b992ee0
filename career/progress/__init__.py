"""Progress analytics: overall progress, visual reports and insights."""
