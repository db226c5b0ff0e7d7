"""
BHC Annual Report
Flask site rendering the consortium's annual report datasets
"""

__version__ = '1.0.0'
