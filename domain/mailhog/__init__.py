"""MailHog 领域模块

定义访问邮件捕获服务所需的契约：
- MailCaptureClient 客户端接口
- HttpTransport / RequestFactory 传输层接口
"""
