"""アプリケーション用のロギングユーティリティ。"""

import logging
import sys


def is_fastapi_context() -> bool:
    """
    FastAPI/uvicornコンテキストで実行中かどうかを判定する。

    Returns:
        bool: uvicornがロードされている場合True、そうでない場合False。
    """
    return "uvicorn" in sys.modules


def get_logger(name: str) -> logging.Logger:
    """
    ロガーインスタンスを取得する。

    uvicorn上（Webサーバー）で実行中の場合は"uvicorn"ロガーを使用し、
    アクセスログと同じフォーマット・出力先にそろえる。
    テストやスクリプトから直接インポートされた場合は、
    呼び出し元のモジュール名でロガーを返す。

    Args:
        name: ロガー名、通常は呼び出し元モジュールの__name__を指定。

    Returns:
        logging.Logger: 設定済みのロガーインスタンス。

    Examples:
        >>> # uvicornで起動したアプリ内
        >>> logger = get_logger(__name__)  # uvicornロガーを返す
        >>>
        >>> # pytestから直接リポジトリを使う場合
        >>> logger = get_logger(__name__)  # app.infrastructure.repositories.item_repositoryロガーを返す
    """
    if is_fastapi_context():
        return logging.getLogger("uvicorn")
    return logging.getLogger(name)
