"""Run pylint with the typed-values plugin and collect its findings."""

import logging
import re
import subprocess
import sys

from typed_values_linter.domain.constants import PLUGIN_MODULE
from typed_values_linter.domain.entities import LinterResult
from typed_values_linter.domain.protocols import GuidanceServiceProtocol, LinterAdapterProtocol

logger = logging.getLogger(__name__)


class PylintAdapter(LinterAdapterProtocol):
    """Runs pylint in a subprocess with only the typed-values messages enabled."""

    MSG_TEMPLATE = "{path}:{line}: {msg_id}: {msg} ({symbol})"
    _LINE = re.compile(r"^(?P<path>.*?):(?P<line>\d+): (?P<code>[A-Z]\d{4}): (?P<msg>.*) \((?P<symbol>[\w-]+)\)$")

    def __init__(self, guidance_service: GuidanceServiceProtocol) -> None:
        self._guidance = guidance_service

    def build_command(self, target_path: str) -> list[str]:
        symbols = self._guidance.get_catalog().symbols()
        return [
            sys.executable,
            "-m",
            "pylint",
            target_path,
            f"--load-plugins={PLUGIN_MODULE}",
            "--disable=all",
            f"--enable={','.join(symbols)}",
            f"--msg-template={self.MSG_TEMPLATE}",
            "--score=n",
        ]

    def gather_results(self, target_path: str) -> list[LinterResult]:
        """Run pylint on target_path and parse its output."""
        cmd = self.build_command(target_path)
        logger.debug("Running %s", " ".join(cmd))
        result = subprocess.run(cmd, capture_output=True, text=True, check=False)
        if result.stderr:
            logger.debug("pylint stderr: %s", result.stderr)
        return self.parse_output(result.stdout)

    def parse_output(self, output: str) -> list[LinterResult]:
        results: list[LinterResult] = []
        for line in output.splitlines():
            match = self._LINE.match(line.strip())
            if not match:
                continue
            results.append(
                LinterResult(
                    code=match["code"],
                    symbol=match["symbol"],
                    message=match["msg"],
                    location=f"{match['path']}:{match['line']}",
                )
            )
        return results
