# notifier.py
import requests

TELEGRAM_API = "https://api.telegram.org"


def send_telegram_message(token: str, chat_id: str, text: str, timeout: float = 10) -> bool:
    """
    Отправляет HTML-сообщение в Telegram, возвращает True при успехе.
    Пустой токен или chat_id — отправка пропускается.
    """
    if not token or not chat_id:
        print("⚠️ TELEGRAM_BOT_TOKEN или TELEGRAM_CHAT_ID пусты — пропускаю отправку")
        return False

    try:
        r = requests.post(
            f"{TELEGRAM_API}/bot{token}/sendMessage",
            json={
                "chat_id": chat_id,
                "text": text,
                "parse_mode": "HTML",
                "disable_web_page_preview": True,
            },
            timeout=timeout,
        )
        r.raise_for_status()
    except requests.RequestException as e:
        print(f"❌ Ошибка отправки в Telegram: {e}")
        return False
    return True
