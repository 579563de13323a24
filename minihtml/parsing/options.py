"""Parser configuration"""
from dataclasses import dataclass
from enum import Enum

from ..common.constants import ROOT_TAG


class RecoveryPolicy(Enum):
    """짝이 맞지 않는 닫는 태그 처리 방식"""
    LENIENT = "lenient"     # 무시하고 커서를 움직이지 않음
    STRICT = "strict"       # MismatchedTagError


@dataclass(frozen=True)
class ParserOptions:
    recovery: RecoveryPolicy = RecoveryPolicy.LENIENT
    include_text: bool = False
    root_tag: str = ROOT_TAG
