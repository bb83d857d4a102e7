"""Subprocess execution utilities with automatic logging."""

import asyncio
import subprocess
from pathlib import Path

from repox.logger import get_logger

logger = get_logger(__name__)


class SubprocessExecutor:
    """Executes subprocess commands with automatic debug logging."""

    @staticmethod
    async def run(
        *args: str,
        cwd: Path | str | None = None,
        env: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> subprocess.CompletedProcess[bytes]:
        """
        Execute a subprocess command with automatic debug logging.

        Args:
            *args: Command arguments
            cwd: Working directory
            env: Environment variables
            timeout: Timeout in seconds

        Returns:
            CompletedProcess-like object with returncode, stdout, stderr

        Raises:
            asyncio.TimeoutError: If timeout is exceeded
            OSError: If the executable cannot be started
        """
        cmd_str = " ".join(args)
        logger.debug(f"Executing subprocess: {cmd_str}")
        if cwd:
            logger.debug(f"Working directory: {cwd}")

        cwd_arg = str(cwd) if cwd else None
        process: asyncio.subprocess.Process | None = None

        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=cwd_arg,
                env=env,
            )

            if timeout:
                stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
            else:
                stdout, stderr = await process.communicate()

            if stdout:
                logger.debug(f"Subprocess stdout: {stdout.decode('utf-8', errors='replace')}")
            if stderr:
                logger.debug(f"Subprocess stderr: {stderr.decode('utf-8', errors='replace')}")

            assert process.returncode is not None
            return subprocess.CompletedProcess(args, process.returncode, stdout, stderr)

        except asyncio.TimeoutError:
            logger.error(f"Subprocess timeout after {timeout}s: {cmd_str}")
            if process:
                process.kill()
            raise
        except Exception as e:
            logger.error(f"Subprocess execution failed: {cmd_str} - {e}")
            raise
