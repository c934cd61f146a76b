"""Calendar rendering: value formatters, builders and the content line writer."""
