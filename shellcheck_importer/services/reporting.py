import logging

from shellcheck_importer.models.issue import EmissionOutcome

logger = logging.getLogger(__name__)


def log_outcome(outcome: EmissionOutcome) -> None:
    """Write one warning per skipped diagnostic and a summary line.

    Every submitted issue is also logged at DEBUG level.
    """
    for issue in outcome.submitted:
        logger.debug(
            "Submitted %s on %s at %s (%s): %s",
            issue.rule_key,
            issue.file.relative_path,
            issue.location,
            issue.severity,
            issue.message,
        )
    for skipped in outcome.skipped:
        logger.debug("Skipped diagnostic %r", skipped.diagnostic)
        logger.warning(
            "Skipped SC%s in %s (%s): %s",
            skipped.diagnostic.code,
            skipped.diagnostic.file,
            skipped.reason,
            skipped.detail,
        )
    logger.info(
        "Imported %d of %d ShellCheck diagnostics",
        len(outcome.submitted),
        outcome.diagnostics_count,
    )
