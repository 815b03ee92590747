# topmark:header:start
#
#   project      : AlignBy
#   file         : engine.py
#   file_relpath : src/alignby/pipeline/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Execution helpers for running pipelines over a list of files (engine layer).

No CLI dependencies: presentation (printing, colors, exit) is the CLI's job.
This module returns structured results and only logs.

Typical usage:

    results, err = run_steps_for_files(
        file_list=files, pipeline=Pipeline.CHECK.steps, config=cfg
    )
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from alignby.config.logging import get_logger
from alignby.core.exit_codes import ExitCode
from alignby.pipeline import runner
from alignby.pipeline.context import ProcessingContext

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

    from alignby.config.logging import AlignbyLogger
    from alignby.config.model import Config
    from alignby.pipeline.steps.base import Step

logger: AlignbyLogger = get_logger(__name__)


def run_steps_for_files(
    *,
    file_list: Sequence[Path],
    pipeline: Sequence[Step],
    config: Config,
    display_names: Mapping[Path, str] | None = None,
) -> tuple[list[ProcessingContext], ExitCode | None]:
    """Run a pipeline for each file and return (results, encountered_error_code).

    Each file is processed independently. The steps record expected failures
    (missing file, permissions, decoding, malformed directives) on the context;
    anything that escapes a step is caught here so the remaining files still run.

    Args:
        file_list: Files to process, in order.
        pipeline: The pipeline steps to execute for each file.
        config: The frozen configuration for the run.
        display_names: Optional user-facing names keyed by path (stdin mode).

    Returns:
        tuple[list[ProcessingContext], ExitCode | None]: ``results`` holds one context
        per file that did not raise; ``error_code`` is the first exit code derived
        from an escaped exception, or ``None``.

    Exit code mapping:
        FILE_NOT_FOUND: `FileNotFoundError`, `IsADirectoryError`.
        PERMISSION_DENIED: `PermissionError`.
        DATA_ERROR: `UnicodeDecodeError`.
        PIPELINE_ERROR: any other exception.
    """
    results: list[ProcessingContext] = []
    encountered_error_code: ExitCode | None = None
    names: Mapping[Path, str] = display_names or {}

    for path in file_list:
        try:
            ctx: ProcessingContext = ProcessingContext.bootstrap(
                path=path, config=config, display_name=names.get(path)
            )
            ctx = runner.run(ctx, pipeline)
            results.append(ctx)
        except (FileNotFoundError, IsADirectoryError) as e:
            logger.error("%s: %s", e, path)
            encountered_error_code = encountered_error_code or ExitCode.FILE_NOT_FOUND
        except PermissionError as e:
            logger.error("%s: %s", e, path)
            encountered_error_code = encountered_error_code or ExitCode.PERMISSION_DENIED
        except UnicodeDecodeError as e:
            logger.error("Encoding error while reading %s: %s", path, e)
            encountered_error_code = encountered_error_code or ExitCode.DATA_ERROR
        except Exception as e:  # noqa: BLE001
            logger.exception("Unexpected error processing %s: %s", path, e)
            encountered_error_code = encountered_error_code or ExitCode.PIPELINE_ERROR

    return results, encountered_error_code
