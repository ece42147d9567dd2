"""Local port inspection"""
import subprocess
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Union, TYPE_CHECKING

from dev_start.models.environment import BusyPort
from dev_start.logging_config import get_logger

if TYPE_CHECKING:
    from dev_start.config import Config

logger = get_logger(__name__)


class PortProbe(ABC):
    """Finds the process listening on a local TCP port."""

    @abstractmethod
    def listener(self, port: int) -> Optional[str]:
        """Return the command name of the listening process, or None if the port is free."""


class LsofPortProbe(PortProbe):
    """PortProbe that shells out to lsof."""

    def __init__(self, config: Union['Config', dict]):
        self.timeout = config.get('probe_timeout', 5.0)

    def _run(self, args: List[str]) -> Optional[str]:
        try:
            result = subprocess.run(
                args, capture_output=True, text=True, timeout=self.timeout, check=False
            )
        except FileNotFoundError:
            logger.debug(f"{args[0]} is not installed")
            return None
        except subprocess.TimeoutExpired:
            logger.debug(f"{' '.join(args)} timed out after {self.timeout}s")
            return None
        if result.returncode != 0:
            # lsof exits 1 when nothing matches
            return None
        return result.stdout

    def listener(self, port: int) -> Optional[str]:
        output = self._run(['lsof', '-nP', f'-iTCP:{port}', '-sTCP:LISTEN', '-Fc'])
        if not output:
            return None
        # Field output: one "p<pid>" line then "c<command>" per process
        for line in output.splitlines():
            if line.startswith('c') and len(line) > 1:
                return line[1:]
        return None


def find_busy_ports(ports: Iterable[int], probe: PortProbe) -> List[BusyPort]:
    """Probe each port in order and collect the ones with a listener."""
    busy = []
    for port in ports:
        process = probe.listener(port)
        logger.debug(f"Port {port}: {process or 'free'}")
        if process:
            busy.append(BusyPort(port=port, process=process))
    return busy
