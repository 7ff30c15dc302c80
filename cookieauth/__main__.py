from cookieauth.app import main

main()
