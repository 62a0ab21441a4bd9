import math


def _percentile(ordered, fraction):
    # Nearest-rank on an already sorted list.
    index = max(0, math.ceil(fraction * len(ordered)) - 1)
    return ordered[index]


def summarize(latencies, total_sec):
    """Collapse per-call latencies (seconds) into a millisecond summary."""
    count = len(latencies)
    if not count:
        return {
            'count': 0,
            'total_sec': total_sec,
            'mean_ms': 0.0,
            'min_ms': 0.0,
            'max_ms': 0.0,
            'p50_ms': 0.0,
            'p95_ms': 0.0,
            'p99_ms': 0.0,
            'ops_per_sec': 0.0,
        }
    ordered = sorted(latencies)
    return {
        'count': count,
        'total_sec': round(total_sec, 6),
        'mean_ms': round(sum(ordered) / count * 1000, 4),
        'min_ms': round(ordered[0] * 1000, 4),
        'max_ms': round(ordered[-1] * 1000, 4),
        'p50_ms': round(_percentile(ordered, 0.50) * 1000, 4),
        'p95_ms': round(_percentile(ordered, 0.95) * 1000, 4),
        'p99_ms': round(_percentile(ordered, 0.99) * 1000, 4),
        'ops_per_sec': round(count / total_sec, 2) if total_sec > 0 else 0.0,
    }
