"""Command line interface for build-ref-tool"""
