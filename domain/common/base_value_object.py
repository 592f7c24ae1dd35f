"""值对象基类"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BaseValueObject:
    """
    值对象基类

    值对象不可变，按属性比较相等性。
    子类覆盖 validate() 实现自身的不变量校验。
    """

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """验证值对象有效性（默认不做任何检查）"""
        pass
