from dataclasses import dataclass, field
from typing import Any, Dict, Union


@dataclass(frozen=True)
class Author:
    """커밋 작성자 (외부 시스템의 사용자 식별자와 1:1 대응)

    동등성과 해시는 user_id 로만 결정된다.
    """
    user_id: str
    full_name: str = field(default="", compare=False)

    def __str__(self) -> str:
        return self.full_name or self.user_id

    def to_dict(self) -> Dict[str, Any]:
        """JSON 직렬화를 위한 딕셔너리 변환"""
        return {'user_id': self.user_id, 'full_name': self.full_name}

    @classmethod
    def from_dict(cls, data: Union[str, Dict[str, Any]]) -> 'Author':
        """딕셔너리(또는 사용자 ID 문자열)에서 Author 객체 생성"""
        if isinstance(data, str):
            return cls(user_id=data)
        return cls(user_id=data['user_id'], full_name=data.get('full_name', ""))


@dataclass(frozen=True)
class Commit:
    """빌드 변경 로그의 커밋 항목"""
    id: str
    author: Author
    message: str = field(default="", compare=False)

    def to_dict(self) -> Dict[str, Any]:
        """JSON 직렬화를 위한 딕셔너리 변환"""
        return {
            'id': self.id,
            'author': self.author.to_dict(),
            'message': self.message
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Commit':
        """딕셔너리에서 Commit 객체 생성"""
        return cls(
            id=data['id'],
            author=Author.from_dict(data['author']),
            message=data.get('message', "")
        )
