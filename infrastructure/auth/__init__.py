"""IMAP 认证基础设施实现"""
