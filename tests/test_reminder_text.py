from datetime import datetime

from moyu_reminder.reminder_text import generate_reminder_text, greeting_for_hour


def test_greeting_buckets() -> None:
    assert greeting_for_hour(0) == "早上好"
    assert greeting_for_hour(9) == "早上好"
    assert greeting_for_hour(11) == "早上好"
    assert greeting_for_hour(12) == "下午好"
    assert greeting_for_hour(14) == "下午好"
    assert greeting_for_hour(18) == "晚上好"
    assert greeting_for_hour(20) == "晚上好"
    assert greeting_for_hour(23) == "晚上好"


def test_generate_reminder_text_full_layout() -> None:
    text = generate_reminder_text(datetime(2024, 1, 1, 9))

    assert text == (
        "【摸鱼办】提醒您：\n"
        "今天是2024年01月01日，星期一。早上好，摸鱼人！即使今天是开工第天，也一定不要忘记摸鱼哦！"
        "有事没事起身去茶水间，去厕所，去廊道走走，别总在工位上坐着，钱是老板的，但健康是自己的。\n"
        "温馨提示：\n"
        "离【01号发工资】：31天\n"
        "离【05号发工资】：4天\n"
        "离【08号发工资】：7天\n"
        "离【10号发工资】：9天\n"
        "离【15号发工资】：14天\n"
        "离【20号发工资】：19天\n"
        "离【25号发工资】：24天\n"
        "离【30号发工资】：29天\n"
        "离【双休周末】还有：5天\n"
        "离【单休周末】还有：6天\n"
        "距离【 国庆 】还有：303天\n"
        "距离【 中秋 】还有：257天\n"
        "距离【2025年】还有：366天\n"
        "距离【下次过年】还有：40天"
    )


def test_generate_reminder_text_uses_evening_greeting() -> None:
    text = generate_reminder_text(datetime(2024, 6, 15, 20, 30))

    assert "今天是2024年06月15日，星期六。晚上好，摸鱼人！" in text
    assert "离【双休周末】还有：0天" in text
    assert "距离【2025年】还有：" in text


def test_generate_reminder_text_is_idempotent() -> None:
    reference = datetime(2024, 9, 18, 14, 5)

    assert generate_reminder_text(reference) == generate_reminder_text(reference)


def test_generate_reminder_text_defaults_to_now() -> None:
    text = generate_reminder_text()

    assert text.startswith("【摸鱼办】提醒您：\n今天是")
    assert text.count("\n") == 16
