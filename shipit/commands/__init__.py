"""shipit CLI commands"""
