"""
Record store module.

역할:
- fingerprint -> 메시지 본문 매핑을 영속화한다.
- load()는 파일이 없으면 `{}`로 만든 뒤 읽고, save()는 이미 있는 파일만 덮어쓴다.
- 프로세스 간 잠금은 하지 않는다. 동시에 쓰면 마지막 save가 이긴다.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from slacker.core.errors import StoreUnavailable

Record = Dict[str, str]


class RecordStore(ABC):
    """전송 기록 저장소 인터페이스"""

    @abstractmethod
    def load(self) -> Record:
        """전체 기록을 읽어온다. 실패 시 StoreUnavailable."""
        pass

    @abstractmethod
    def save(self, record: Record) -> None:
        """전체 기록을 덮어쓴다. 실패 시 StoreUnavailable."""
        pass


def _validate_record(data: object) -> Record:
    if not isinstance(data, dict):
        raise StoreUnavailable(f"record must be a JSON object, got {type(data).__name__}")
    for key, value in data.items():
        if not isinstance(value, str):
            raise StoreUnavailable(f"record value for {key!r} is not a string")
    return dict(data)


class JsonFileRecordStore(RecordStore):
    """JSON 파일 하나에 기록 전체를 저장하는 저장소."""

    def __init__(self, path: str = "slacker.json"):
        self.path = Path(path)

    def _create(self) -> None:
        try:
            with self.path.open("x", encoding="utf-8") as fh:
                fh.write("{}")
        except FileExistsError:
            # 다른 호출자가 먼저 만들었으면 그 파일을 그대로 쓴다
            return
        except OSError as exc:
            raise StoreUnavailable(f"failed to create database file {self.path}: {exc}") from exc

    def load(self) -> Record:
        if not self.path.exists():
            self._create()

        try:
            with self.path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as exc:
            raise StoreUnavailable(f"failed to load database {self.path}: {exc}") from exc

        return _validate_record(data)

    def save(self, record: Record) -> None:
        try:
            payload = json.dumps(_validate_record(record), ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise StoreUnavailable(f"failed to encode database: {exc}") from exc

        try:
            # "r+"는 파일이 없으면 실패한다. 생성은 load()의 몫
            with self.path.open("r+", encoding="utf-8") as fh:
                fh.write(payload)
                fh.truncate()
        except OSError as exc:
            raise StoreUnavailable(f"failed to open database file {self.path}: {exc}") from exc
        except ValueError as exc:
            # UnicodeEncodeError: surrogateescape 로 들어온 argv 등 utf-8 로 못 쓰는 문자
            raise StoreUnavailable(f"failed to write database file {self.path}: {exc}") from exc


class InMemoryRecordStore(RecordStore):
    """테스트/임베딩용 메모리 저장소. 프로세스 재시작 시 내용이 사라진다."""

    def __init__(self, initial: Optional[Record] = None):
        self._record: Record = dict(initial or {})
        self.saves = 0

    def load(self) -> Record:
        return dict(self._record)

    def save(self, record: Record) -> None:
        self._record = _validate_record(record)
        self.saves += 1
