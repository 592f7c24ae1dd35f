"""邮件状态领域模块

该模块包含本地缓存的邮件同步状态模型，包括：
- MailStateRecord 值对象
- LookupResult 查询结果
- MailStateRepository 仓储接口
"""
