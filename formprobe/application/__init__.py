"""
应用层

编排页面对象完成完整的业务流程。
"""
