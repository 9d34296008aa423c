from doccrawl.main import main

main()
