import rundeckjob.defaults as defaults
from rundeckjob.errors import (
    DuplicateNotificationType,
    TooManyNotificationBlocks,
    TooManyNotificationPlugins,
    UnknownNotificationType,
)
from rundeckjob.translate.commands import plugin_from_flat, plugin_to_flat
from rundeckjob.types import (
    EmailNotification,
    Notification,
    Notifications,
    WebHookNotification,
)


def from_flat(blocks):
    """
    Build a Notifications set from up to three flat notification blocks.

    Each block names its trigger type, and a trigger can only be used once.
    """
    blocks = blocks or []
    if len(blocks) > len(defaults.notification_types):
        raise TooManyNotificationBlocks(len(blocks))

    notifications = Notifications()
    for block in blocks:
        trigger = block.get("type")
        if trigger not in defaults.notification_types:
            raise UnknownNotificationType(trigger)

        notification = notification_from_flat(block)
        if notifications.get(trigger) is not None:
            raise DuplicateNotificationType(trigger)
        notifications.set(trigger, notification)
    return notifications


def notification_from_flat(block):
    notification = Notification()

    # Only the first email block is used
    emails = block.get("email") or []
    if emails:
        email = emails[0]
        notification.email = EmailNotification(
            recipients=list(email.get("recipients") or []),
            subject=email.get("subject") or "",
            attach_log=bool(email.get("attach_log", False)),
        )

    # The webhook is flattened onto the block, and exists when it has urls
    urls = block.get("webhook_urls") or []
    if urls:
        notification.webhook = WebHookNotification(
            urls=list(urls),
            http_method=block.get("webhook_http_method") or "",
            format=block.get("webhook_format") or "",
        )

    plugins = block.get("plugin") or []
    if len(plugins) > 1:
        raise TooManyNotificationPlugins(block.get("type"))
    if plugins:
        notification.plugin = plugin_from_flat(plugins[0])
    return notification


def to_flat(notifications):
    """
    One block per populated trigger, always success, failure, then start.
    """
    return [notification_to_flat(n, trigger) for trigger, n in notifications.items()]


def notification_to_flat(notification, trigger):
    block = {"type": trigger}
    if notification.webhook is not None:
        block["webhook_urls"] = list(notification.webhook.urls)
        block["webhook_http_method"] = notification.webhook.http_method
        block["webhook_format"] = notification.webhook.format
    if notification.email is not None:
        block["email"] = [
            {
                "attach_log": notification.email.attach_log,
                "subject": notification.email.subject,
                "recipients": list(notification.email.recipients),
            }
        ]
    if notification.plugin is not None:
        block["plugin"] = [plugin_to_flat(notification.plugin)]
    return block
