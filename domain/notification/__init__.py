"""通知领域模块

该模块包含推送通知相关的领域模型，包括：
- ReceivedNotification 收到的通知值对象
- NotificationEventType 事件类型
- MailQueryClient 远程查询服务接口
"""
