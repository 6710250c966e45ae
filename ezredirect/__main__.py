from ezredirect.app import main

main()
