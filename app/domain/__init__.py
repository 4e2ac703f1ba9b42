"""Domain packages: one router/service/repository set per business area"""
