"""빌드 진단 로그 출력

각 컴포넌트는 공유 로그 리스트 대신 DiagnosticSink 객체를 명시적으로 전달받아
사람이 읽는 진행/실패 메시지를 남깁니다. 메시지 형식은 자유 형식이며
기계가 읽는 계약은 없습니다.

- log(): 항상 출력되는 메시지
- debug(): debug_enabled 일 때만 출력되는 메시지
"""

import logging
from abc import ABC, abstractmethod
from typing import List, TextIO

logger = logging.getLogger(__name__)


class DiagnosticSink(ABC):
    """추가 전용 진단 로그 인터페이스"""

    def __init__(self, debug_enabled: bool = False):
        self.debug_enabled = debug_enabled

    @abstractmethod
    def write(self, message: str) -> None:
        """완성된 메시지 한 줄을 기록"""
        pass

    def log(self, message_format: str, *arguments) -> None:
        self.write(_format(message_format, arguments))

    def debug(self, message_format: str, *arguments) -> None:
        if self.debug_enabled:
            self.write(_format(message_format, arguments))


def _format(message_format: str, arguments) -> str:
    return message_format % arguments if arguments else message_format


class LoggingDiagnosticSink(DiagnosticSink):
    """표준 logging 으로 전달하는 진단 로그"""

    def __init__(self, target: logging.Logger = logger, debug_enabled: bool = False):
        super().__init__(debug_enabled)
        self.target = target

    def write(self, message: str) -> None:
        self.target.info(message)

    def debug(self, message_format: str, *arguments) -> None:
        if self.debug_enabled:
            super().debug(message_format, *arguments)
        else:
            self.target.debug(_format(message_format, arguments))


class StreamDiagnosticSink(DiagnosticSink):
    """빌드 콘솔 등 텍스트 스트림에 한 줄씩 기록하는 진단 로그"""

    def __init__(self, stream: TextIO, debug_enabled: bool = False):
        super().__init__(debug_enabled)
        self.stream = stream

    def write(self, message: str) -> None:
        try:
            self.stream.write(message + "\n")
            self.stream.flush()
        except (OSError, ValueError) as e:
            # 콘솔 출력 실패는 계산 결과에 영향을 주지 않는다
            logger.warning(f"진단 로그 출력 실패: {e} - {message}")


class RecordingDiagnosticSink(DiagnosticSink):
    """메모리에 메시지를 보관하는 진단 로그"""

    def __init__(self, debug_enabled: bool = False):
        super().__init__(debug_enabled)
        self.lines: List[str] = []

    def write(self, message: str) -> None:
        self.lines.append(message)

    def contains(self, fragment: str) -> bool:
        """fragment 를 포함하는 메시지가 있는지 여부"""
        return any(fragment in line for line in self.lines)
