"""
路由层异常

lookup 只有一种失败：Topic 不在预定义集合内。
不做模糊匹配、不降级，直接抛给调用方，由调用方（通常是 Agent）自行选择最接近的 Topic。
"""


class RoutingError(Exception):
    """路由层异常基类"""


class TopicNotRecognized(RoutingError, LookupError):
    """Topic 不在预定义集合内"""

    def __init__(self, topic: object, known_topics: tuple[str, ...]):
        super().__init__(f"未识别的 Topic: {topic!r}")
        self.topic = topic
        self.known_topics = known_topics


class DocumentNotFound(RoutingError, LookupError):
    """DocumentRef 名称不存在"""

    def __init__(self, name: object):
        super().__init__(f"未知文档: {name!r}")
        self.name = name
