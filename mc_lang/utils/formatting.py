"""
Helpers that turn run statistics into short human-readable strings.
"""

SIZE_UNITS = ("B", "KB", "MB", "GB")


def format_size(byte_count: int) -> str:
    """'1536' -> '1.5 KB'. Language files are small, so GB is the largest unit."""
    if byte_count <= 0:
        return "0 B"
    size = float(byte_count)
    for unit in SIZE_UNITS[:-1]:
        if size < 1024:
            return f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} {SIZE_UNITS[-1]}"


def format_duration(seconds: float) -> str:
    """Formats elapsed seconds as e.g. '3m 12s'; runs under a second show '0s'."""
    minutes, secs = divmod(int(seconds), 60)
    hours, minutes = divmod(minutes, 60)
    parts = [f"{value}{suffix}" for value, suffix in ((hours, "h"), (minutes, "m")) if value]
    if secs or not parts:
        parts.append(f"{secs}s")
    return " ".join(parts)
