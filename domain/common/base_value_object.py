"""值对象基类"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BaseValueObject:
    """
    值对象基类

    值对象没有标识，通过属性值判断相等，创建后不可修改。
    子类必须使用 @dataclass(frozen=True) 声明。
    """
