from datetime import datetime
import uuid


def channelUUID_generate(name: str = "") -> str:
    """
    Generate a unique channel ID in the format YYYYMMDDHHmmSSmmm-<uuid>[-<name>].

    :param name: Optional channel name to include in the ID.
    :return: A channel ID string.
    """
    now = datetime.now()
    timestamp = now.strftime("%Y%m%d%H%M%S") + f"{now.microsecond // 1000:03d}"
    unique_id = uuid.uuid4().hex
    channel_id = f"{timestamp}-{unique_id}"
    if name:
        channel_id += f"-{name.replace('/', '_')}"
    return channel_id
