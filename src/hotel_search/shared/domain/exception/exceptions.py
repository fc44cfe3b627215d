class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ValidationException(DomainException, ValueError):
    """値が不正な場合（名前・価格・座標の範囲外など）"""

    pass


class NullArgumentException(DomainException, TypeError):
    """必須の参照が渡されなかった場合"""

    def __init__(self, argument_name: str) -> None:
        super().__init__(f"{argument_name} is required")
        self.argument_name = argument_name


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（名前と位置の重複、条件付き書き込みの失敗時）"""

    pass


class StoreException(DomainException):
    """永続化層の失敗（原因は __cause__ に保持する）"""

    pass


class OperationCancelledException(DomainException):
    """キャンセルが要求され処理を中断した場合"""

    pass
