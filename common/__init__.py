"""公共工具模块"""
