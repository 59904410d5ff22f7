# Author: Bradley R. Kinnard — counting everything

"""Prometheus metrics. Import and use from anywhere. CLI can dump them to a textfile for node_exporter."""

from pathlib import Path

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest, write_to_textfile

# per-file outcomes
files_total = Counter(
    "jaxbstrip_files_total",
    "ObjectFactory.java files processed",
    ["status"]  # stripped, unchanged, failed
)

# fatal run errors (traversal, temp file)
run_errors_total = Counter(
    "jaxbstrip_run_errors_total",
    "Runs aborted by a fatal error",
    ["kind"]
)

run_latency = Histogram(
    "jaxbstrip_run_seconds",
    "Wall time of a full normalization run",
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 5.0, 30.0]
)

# http surface
strip_requests_total = Counter(
    "jaxbstrip_strip_requests_total",
    "POST /strip requests",
    ["changed"]
)


def get_metrics() -> bytes:
    """dump all metrics in prometheus format"""
    return generate_latest(REGISTRY)


def dump_metrics(path: Path) -> None:
    """atomic textfile write, prometheus_client handles the tmp+rename"""
    write_to_textfile(str(path), REGISTRY)
