"""書籍カタログデモのアプリケーション状態ライブラリ."""
