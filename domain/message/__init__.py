"""邮件消息领域模块

该模块包含 MailHog 捕获邮件的领域模型，包括：
- Message 值对象
- Contact / ContactCollection 联系人值对象
- Attachment 附件值对象
- 消息相关的领域异常
"""
