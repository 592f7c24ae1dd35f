"""通知应用模块"""
