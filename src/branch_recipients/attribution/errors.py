"""수신자 계산 중 발생하는 에러"""


class RecipientProviderError(Exception):
    """branch_recipients 패키지 에러의 기본 클래스"""
    pass


class RepositoryAccessError(RecipientProviderError):
    """저장소 위치를 해석하거나 저장소를 열 수 없을 때 발생하는 에러"""
    pass
