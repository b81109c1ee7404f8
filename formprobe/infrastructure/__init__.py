"""
基础设施层

浏览器管理、JavaScript 脚本、HTTP 客户端等外部依赖的适配实现。
"""
