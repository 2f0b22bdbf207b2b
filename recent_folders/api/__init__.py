"""Public API for collecting, ranking and publishing recent folders."""
