from fulcrum_mcp.server import main

main()
