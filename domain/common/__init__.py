"""领域通用组件"""
