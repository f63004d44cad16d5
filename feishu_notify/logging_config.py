# feishu_notify/logging_config.py
import logging
import sys


def setup_logging(level: int = logging.INFO):
    """
    feishu-notify 실행 로그 설정

    요청/응답 dump 는 stdout 으로 나가서 Actions 잡 로그에 남는다.
    ::error:: / ::notice:: annotation 은 main() 이 logging 을 거치지 않고 직접 출력한다.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # 한 프로세스에서 main() 을 여러 번 불러도 로그가 중복되지 않게
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    )
    root_logger.addHandler(console_handler)

    # httpx 요청 로그에는 토큰이 들어간 URL 이 그대로 찍힌다
    logging.getLogger("httpx").setLevel(logging.WARNING)
