"""공통 예외

모든 도메인 예외는 TonguesImageError를 상속. CLI는 메시지만 stderr로 출력.
Gemini 전송 계층 예외(UpstreamServiceError)는 감싸지 않고 그대로 전파.
"""


class TonguesImageError(Exception):
    pass
