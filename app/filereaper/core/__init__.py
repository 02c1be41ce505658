"""Core tracker machinery: errors, settings, paths, tracker and reaper."""
