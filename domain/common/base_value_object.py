"""值对象基类"""

from abc import ABC


class BaseValueObject(ABC):
    """
    值对象基类

    子类使用 @dataclass(frozen=True) 声明，创建后自动调用 validate()。
    """

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """验证值对象的有效性，子类按需覆盖"""
