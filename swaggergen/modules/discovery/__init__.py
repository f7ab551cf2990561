from .scanner import PackageScanner, ScanResult

__all__ = ['PackageScanner', 'ScanResult']
