# Author: Bradley R. Kinnard — the orchestrator

"""
Main run pipeline. Walk, strip, replace, report.
One broken file doesn't wedge the build; a broken walk does.
"""

import logging
import time
from pathlib import Path

from src.jaxbstrip.adapters import metrics_client
from src.jaxbstrip.core.errors import ReplaceFailed, StripError, TransformFailed
from src.jaxbstrip.core.models import FileOutcome, FileStatus, NormalizationJob, RunReport
from src.jaxbstrip.core.replacer import replace
from src.jaxbstrip.core.stripper import strip
from src.jaxbstrip.core.temp_artifact import TempArtifact
from src.jaxbstrip.core.traverser import find_candidates

log = logging.getLogger(__name__)

GOAL = "strip-jaxb"


def process_file(path: Path, tmp: TempArtifact, encoding: str) -> FileOutcome:
    """
    Strip one file through the temp artifact. Never raises for per-file problems,
    returns a failed outcome instead and leaves the original alone.
    """
    log.info(f"Stripping {path.absolute()}")
    try:
        changed = strip(path, tmp.path, encoding)
        if not changed:
            # nothing to remove, keep the original and its mtime
            log.info(f"no generator header in {path}, leaving it alone")
            return FileOutcome(path=path, status=FileStatus.UNCHANGED)
        replace(tmp.path, path)
        return FileOutcome(path=path, status=FileStatus.STRIPPED)
    except (TransformFailed, ReplaceFailed) as e:
        log.error(f"Error when normalizing {path.absolute()}: {e.cause}", exc_info=e)
        return FileOutcome(path=path, status=FileStatus.FAILED, error_kind=e.kind, message=str(e.cause))


def normalize(job: NormalizationJob) -> RunReport:
    """
    Full run:
    1. skip flag -> one log line, done
    2. no root -> empty report, still a success
    3. every ObjectFactory.java -> strip into temp, swap in if it changed
    TraversalFailed / TempArtifactFailed propagate, the caller decides the exit code.
    """
    report = RunReport(root=job.root)

    if job.skip:
        log.info(f'Skipping execution of goal "{GOAL}"')
        report.skipped = True
        return report

    if not job.root.is_dir():
        log.info(f"{job.root} does not exist or is not a directory, nothing to do")
        return report

    start = time.perf_counter()
    try:
        with TempArtifact(job.root) as tmp:
            for path in find_candidates(job.root):
                outcome = process_file(path, tmp, job.encoding)
                metrics_client.files_total.labels(status=outcome.status.value).inc()
                report.files.append(outcome)
    except StripError as e:
        metrics_client.run_errors_total.labels(kind=e.kind).inc()
        log.error(f"run aborted: {e}")
        raise
    finally:
        elapsed = time.perf_counter() - start
        metrics_client.run_latency.observe(elapsed)
        report.took_ms = int(elapsed * 1000)

    log.info(
        f"done in {report.took_ms}ms | stripped={report.stripped} "
        f"unchanged={report.unchanged} failed={report.failed}"
    )
    return report
