"""IMAP 认证应用层"""
