"""Parser and networking defaults"""

# 파싱 결과 트리의 가상 루트 태그 이름
ROOT_TAG = "document"

# traverse / save_tree 출력의 depth 당 들여쓰기 칸 수
INDENT_WIDTH = 4

DEFAULT_ENCODING = "utf-8"

# 네트워크 요청 타임아웃 (초)
DEFAULT_TIMEOUT = 10.0
MAX_NETWORK_WORKERS = 4
MAX_REDIRECTS = 5
