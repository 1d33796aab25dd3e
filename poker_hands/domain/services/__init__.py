"""领域服务"""
