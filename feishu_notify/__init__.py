# feishu_notify/__init__.py
"""
Feishu(Lark) 커스텀 봇 webhook 알림 액션
"""
__version__ = "0.1.0"
