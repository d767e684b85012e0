"""
服务层异常

业务规则违反统一抛 ValueError（路由转换为 400），
记录不存在抛 NotFoundError（路由转换为 404）。
"""


class NotFoundError(ValueError):
    """记录不存在"""
