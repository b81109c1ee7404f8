"""
formprobe - DEMOQA 练习表单与 ReqRes API 的端到端测试套件

包结构:
- domain: 表单记录、确认弹窗记录、异常与校验
- core: 页面对象及其填充/弹窗/核对组件、API 契约检查
- infrastructure: DrissionPage 浏览器管理、JS 脚本、ReqRes HTTP 客户端
- application: 一次完整提交流程的服务封装
- data: 静态与 Faker 生成的测试数据
"""

__version__ = "1.0.0"
