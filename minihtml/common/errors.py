"""Exception hierarchy"""


class MiniHTMLError(Exception):
    """minihtml 에서 발생하는 모든 예외의 베이스"""


class ParseError(MiniHTMLError):
    """STRICT 복구 정책에서만 발생하는 파싱 오류"""


class MismatchedTagError(ParseError):
    """닫는 태그가 현재 커서의 태그와 맞지 않을 때"""

    def __init__(self, expected, found):
        self.expected = expected
        self.found = found
        super().__init__(f"closing tag </{found}> does not match open <{expected}>")


class FetchError(MiniHTMLError):
    """입력을 가져오는 단계(네트워크, 파일)의 실패"""


class UnsupportedURLError(FetchError, ValueError):
    pass


class HTTPStatusError(FetchError):
    def __init__(self, url, status, reason=""):
        self.url = url
        self.status = status
        self.reason = reason
        super().__init__(f"{url} responded with {status} {reason}".rstrip())
