"""邮件状态基础设施模块"""
