"""Email delivery commands (emails:*)."""
