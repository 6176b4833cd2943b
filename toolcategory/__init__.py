"""ToolCategory badge verification service."""
