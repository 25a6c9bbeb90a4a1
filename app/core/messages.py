from __future__ import annotations

from app.models.enums import NoticeKind
from app.services.session import Notice

_TEMPLATES: dict[NoticeKind, str] = {
    NoticeKind.favorite_added: "Добавлено в избранное",
    NoticeKind.favorite_removed: "Удалено из избранного",
    NoticeKind.visited: '"{name}" отмечено как посещенное',
    NoticeKind.route_added: '"{name}" добавлено в маршрут',
    NoticeKind.route_duplicate: '"{name}" уже в маршруте',
    NoticeKind.route_removed: "Место удалено из маршрута",
    NoticeKind.route_cleared: "Маршрут очищен",
    NoticeKind.navigating: 'Прокладываю маршрут до "{name}"',
    NoticeKind.comment_saved: "Комментарий к коллекции сохранен",
}


def notice_message(notice: Notice) -> str:
    return _TEMPLATES[notice.kind].format(name=notice.place_name or "")
